from fastapi import FastAPI
from weather_widget.routes.weather_route import router as weather_router

app = FastAPI(title="Weather Widget")
app.include_router(weather_router)

# --- Root Endpoint ---
@app.get("/")
async def root():
    return {
        "message": "Welcome to Weather Widget API",
        "status": "running",
        "endpoints": {
            "health": "/health",
            "search": "/weather/search",
            "geolocation": "/weather/geolocation",
            "codes": "/weather/codes",
            "docs": "/docs"
        },
        "version": "1.0.0"
    }

# --- Health Check ---
@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "Weather Widget"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("weather_widget.main:app", host="0.0.0.0", port=8000, reload=True)
