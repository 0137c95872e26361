from fastapi import FastAPI
import logging
from fastapi.middleware.cors import CORSMiddleware

app = FastAPI(title="Mind Map Layout API",
              description="Automatic placement of mind map nodes",
              version="0.1.0")

# Configure logging to show info-level logs from routers and solvers
logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(name)s: %(message)s')

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    return {"message": "Mind Map Layout API"}


@app.get("/health")
async def health():
    """Health endpoint for local checks.

    Returns a small JSON with service status and available endpoints.
    """
    return {
        "status": "ok",
        "service": "mindmap-layout",
        "version": "0.1.0",
        "routes": [
            "/api/layout/optimize"
        ]
    }

# Import routers
from .routers import layout
app.include_router(layout.router, prefix="/api/layout", tags=["layout"])

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("mindmap_layout.main:app", host="0.0.0.0", port=8000, reload=True)
