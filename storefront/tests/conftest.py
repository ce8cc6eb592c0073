from __future__ import annotations

import os
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="storefront-tests-")

# Config and the engine are built at import time, so the environment is pinned first.
os.environ.update(
    {
        "APP_ENV": "test",
        "SECRET_KEY": "storefront-test-signing-key",
        "DATABASE_URL": f"sqlite:///{os.path.join(_TMP_DIR, 'storefront.db')}",
        "LOG_FILE": os.path.join(_TMP_DIR, "storefront.log"),
        "COOKIE_SECURE": "0",
        "ENABLE_RATE_LIMIT": "0",
        "SEED_PRODUCTS": "1",
        "REQUIRE_ADMIN": "1",
    }
)
os.environ.pop("ADMIN_USERNAME", None)

import pytest  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402

from storefront.app import create_app  # noqa: E402
from storefront.infrastructure.container import Container  # noqa: E402
from storefront.infrastructure.db import ENGINE, Base  # noqa: E402


@pytest.fixture()
def reset_database():
    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    yield
    Base.metadata.drop_all(bind=ENGINE)


@pytest.fixture()
def app(reset_database) -> Flask:
    flask_app = create_app(Container())
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
