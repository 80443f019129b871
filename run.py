"""
Launch script for the sodam backend
"""
import sys
from pathlib import Path

# Project root on PYTHONPATH
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

if __name__ == "__main__":
    import uvicorn
    from sodam.config import load_settings
    from sodam.core.exceptions import ConfigurationError
    from sodam.main import create_app

    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(f"Invalid configuration: {e.message}", file=sys.stderr)
        for error in e.details.get("errors", []):
            print(f"  {error['field']}: {error['message']}", file=sys.stderr)
        sys.exit(1)

    app = create_app(settings)

    print(f"Starting {settings.app_name} v{settings.app_version}")
    print(f"Server: http://{settings.host}:{settings.port}")
    print(f"Docs: http://{settings.host}:{settings.port}/docs")
    print(f"Debug mode: {settings.debug}")
    print()

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower()
    )
