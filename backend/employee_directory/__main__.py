"""Run the service with ``python -m employee_directory``."""
import uvicorn

from .config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "employee_directory.main:app",
        host="0.0.0.0",
        port=settings.employee_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
