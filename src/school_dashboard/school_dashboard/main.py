from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .app_logger import setup_logging
from .core.constants import DEFAULT_API_PREFIX
from .core.enums import DeletePolicy
from .database.bootstrap import seed_demo_data
from .database.store import MemoryStore

from .container import build_container
from .activities.controller import register as register_activities
from .alerts.controller import register as register_alerts
from .attendance.controller import register as register_attendance
from .dashboard.controller import register as register_dashboard
from .reports.controller import register as register_reports
from .schools.controller import register as register_schools
from .students.controller import register as register_students
from .teachers.controller import register as register_teachers
from .users.controller import register as register_users


def create_app(settings_module: Optional[str] = None, *, store: Optional[MemoryStore] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["API_PREFIX"] = getattr(settings, "API_PREFIX", DEFAULT_API_PREFIX).rstrip("/")

    logger = setup_logging(getattr(settings, "LOG_LEVEL", None))

    delete_policy = DeletePolicy(getattr(settings, "SCHOOL_DELETE_POLICY", DeletePolicy.ORPHAN.value))
    container = build_container(
        store=store,
        delete_policy=delete_policy,
        enforce_references=bool(getattr(settings, "ENFORCE_REFERENTIAL_INTEGRITY", True)),
    )
    app.extensions["school_dashboard"] = container

    if bool(getattr(settings, "SEED_DEMO_DATA", False)):
        seed_demo_data(container)

    logger.info(
        "app ready settings=%s prefix=%s delete_policy=%s",
        settings_module, app.config["API_PREFIX"], delete_policy.value,
    )

    register_users(app, container)
    register_schools(app, container)
    register_teachers(app, container)
    register_students(app, container)
    register_attendance(app, container)
    register_reports(app, container)
    register_alerts(app, container)
    register_activities(app, container)
    register_dashboard(app, container)

    @app.errorhandler(HTTPException)
    def http_error(e: HTTPException):
        return jsonify({"message": e.description}), e.code

    return app
