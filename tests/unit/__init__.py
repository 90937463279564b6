"""
Unit tests for MediScan.

Test individual components in isolation:
- Data models (defaults, coercion, envelope invariants)
- Local classifier (rule tables, urgency priority)
- JSON extraction and response normalization
- Prompt builder and Gemini client (mocked transport)
- Analysis orchestrator (mocked LLM client)
"""
