from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .reports.controller import register as register_reports


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    report_config = getattr(settings, "REPORT_CONFIG")

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger = logging.getLogger("punchclock")
    logger.info(
        "settings=%s expected_hours_per_day=%s overnight_policy=%s",
        settings_module,
        report_config.get("expected_hours_per_day"),
        report_config.get("overnight_policy"),
    )

    container = container or build_container(report_config=report_config)
    app.extensions["punchclock"] = container

    register_reports(app, container)

    return app
