"""
Script to run the backend server with proper Python path configuration.
This script ensures that the backend modules can be imported correctly
when running the server from outside the backend directory.
"""

import sys
import os

# Add the backend directory to the Python path
backend_dir = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, backend_dir)


def main():
    import uvicorn
    from core.config import settings

    print(f"Starting Writing Assistant API on {settings.HOST}:{settings.PORT}")
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=False,
    )


if __name__ == "__main__":
    main()
