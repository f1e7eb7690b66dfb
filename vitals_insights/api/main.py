# vitals_insights/api/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vitals_insights.api.routes import insight_routes
from vitals_insights.config.config_manager import ConfigManager, configure_logging


def create_app(config: ConfigManager = None) -> FastAPI:
    config = config or ConfigManager()

    app = FastAPI(
        title=config.get('api.title'),
        description=config.get('api.description'),
        version=config.get('api.version')
    )

    # Enable CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.get('api.cors_origins', ["*"]),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(insight_routes.router)

    @app.get("/")
    async def root():
        return {
            "message": "Welcome to the Vitals Insights API",
            "version": config.get('api.version'),
            "documentation": "/docs"
        }

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    settings = ConfigManager()
    configure_logging(settings)
    uvicorn.run(app, host=settings.get('api.host'), port=settings.get('api.port'))
