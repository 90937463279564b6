"""
MediScan AI symptom analysis service.

Takes a patient's age and free-text symptoms and returns a structured
analysis containing:
- Candidate conditions with confidence and recommendations
- Urgency level
- Red-flag symptoms that need immediate attention

Architecture: FastAPI orchestrator + Gemini inference + deterministic local fallback
"""

__version__ = "2.0.0"
