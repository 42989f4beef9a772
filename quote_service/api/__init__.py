"""HTTP surface: FastAPI app, routers and dependencies."""
