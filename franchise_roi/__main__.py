from __future__ import annotations

import logging

import uvicorn

from .config import DEFAULT_SERVICE_CONFIG


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run("franchise_roi.app:app", host="0.0.0.0", port=DEFAULT_SERVICE_CONFIG.port)


if __name__ == "__main__":
    main()
