"""Generation steps package.

- ai_client: Calls the Google Gemini generateContent endpoint
- template_engine: Assembles emails from fixed templates
"""
