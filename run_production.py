import os

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "pgfinder.main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "3000")),
        reload=False,
        workers=1,  # single worker keeps SQLite writes serialised
        log_level="info",
        access_log=True
    )
