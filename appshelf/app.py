# app.py
# Runs the appshelf web application under uvicorn (python -m appshelf.app)

import os

import uvicorn


def main():
    port = int(os.environ.get("PORT", 5060))
    debug = os.environ.get("DEBUG", "false").lower() == "true"
    uvicorn.run(
        "appshelf.main:app",
        host="127.0.0.1",
        port=port,
        reload=debug
    )


if __name__ == "__main__":
    main()
