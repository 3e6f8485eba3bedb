"""
Services layer - business logic for alerts, identity issuance,
dashboard figures, accounts and the tracker feed.

DESIGN PRINCIPLE:
- Services contain business logic, NOT routes
- Services receive their store and providers in the constructor
- Routes get the process-wide instances through the get_*_service() functions
"""
