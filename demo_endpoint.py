"""
Quick demo script to run the career advisor endpoint locally.

This script starts a local server and shows how to make requests to it.
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting Career Advisor Backend Demo")
    print("=" * 60)
    print()
    print("📌 API Endpoints:")
    print("   - Health Check:    GET  http://localhost:8000/health")
    print("   - Career Advisor:  POST http://localhost:8000/career-advisor")
    print("   - Degree List:     GET  http://localhost:8000/career-advisor/degrees")
    print("   - API Docs:             http://localhost:8000/docs")
    print()
    print("🔐 Configuration:")
    print("   AI_GATEWAY_API_KEY must be set (environment or .env)")
    print()
    print("📝 Test with curl:")
    print('   curl -X POST "http://localhost:8000/career-advisor" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"interests": "fastapi, nodejs", "degree": "Computer Science", '
          '"cgpa": 3.5, "careerGoal": "become a data scientist"}\'')
    print()
    print("   or: python scripts/career_advisor_cli.py")
    print()
    print("=" * 60)
    print("Starting server on http://localhost:8000")
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "career_advisor.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
