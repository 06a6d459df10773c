from finance_tracker.main import app
import os
import uvicorn

if __name__ == "__main__":
    port = int(os.getenv("PORT", 8000))
    uvicorn.run("finance_tracker.main:app", host="0.0.0.0", port=port, reload=True)
