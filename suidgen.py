"""SUID Generator - Entry Point."""

from config import load_config
from api.app import create_app

config = load_config()
app = create_app(config)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.server.host, port=config.server.port)
