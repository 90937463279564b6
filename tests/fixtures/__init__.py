"""
Test fixtures for MediScan.

Contains sample upstream payloads:
- gemini_response.json: generateContent response whose text wraps JSON in prose
- completion_fenced.txt: completion with the JSON inside a markdown code fence
- completion_prose.txt: completion with no JSON at all
"""
