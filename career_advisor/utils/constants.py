"""
Cross-origin constants for the career advisor endpoint.

Browser clients call the endpoint from any origin, sending the Supabase JS
client headers alongside the JSON body, so those are allow-listed here.
"""

CORS_ALLOWED_HEADERS = [
    "authorization",
    "x-client-info",
    "apikey",
    "content-type",
    "x-supabase-client-platform",
    "x-supabase-client-platform-version",
    "x-supabase-client-runtime",
    "x-supabase-client-runtime-version",
]

# Attached to every /career-advisor response, errors included
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": ", ".join(CORS_ALLOWED_HEADERS),
}
