"""
Contact Management App

Handles the portfolio contact form:
- Public submission endpoint with per-IP rate limiting
- Owner notification email via a background task
- Admin listing, search and triage (read / archived / notes)
"""
