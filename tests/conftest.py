import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Selects the Protean config overlay and keeps password hashing cheap.
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env
    os.environ.setdefault("BCRYPT_ROUNDS", "4")
    os.environ.setdefault("JWT_SECRET", "storefront-test-signing-key-0123456789")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def storefront_bed():
    from protean.integrations.pytest import DomainFixture

    # Routers import every command module, including the nested cart and order ones
    from storefront.app import build_app  # noqa: F401
    from storefront.domain import storefront

    bed = DomainFixture(storefront)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(storefront_bed):
    """Run every test inside the storefront context and wipe storage afterwards."""
    with storefront_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()
        current_domain.event_store.store._data_reset()


# ---------------------------------------------------------------------------
# Shared factories
# ---------------------------------------------------------------------------
@pytest.fixture()
def make_user():
    """Persist a user and return it."""
    from protean import current_domain

    from storefront.identity.user import User

    counter = iter(range(1, 1000))

    def _make(role="user", username=None, email=None, password="secret123"):
        n = next(counter)
        user = User.register(
            username=username or f"shopper{n}",
            email=email or f"shopper{n}@test.tn",
            password=password,
            role=role,
        )
        current_domain.repository_for(User).add(user)
        return user

    return _make


@pytest.fixture()
def make_product():
    """Persist a product and return it."""
    from protean import current_domain

    from storefront.catalogue.product import Product

    def _make(**fields):
        values = {"name": "Widget", "price": 100.0, "stock": 10, "category": "Misc"}
        values.update(fields)
        product = Product.create(**values)
        current_domain.repository_for(Product).add(product)
        return product

    return _make


@pytest.fixture()
def identity_of():
    from storefront.identity.access import Identity
    from storefront.identity.user import Role

    def _identity(user):
        return Identity(user_id=str(user.id), role=Role(user.role))

    return _identity


@pytest.fixture()
def auth_header():
    from storefront.identity.tokens import issue_token

    def _header(user):
        return {"Authorization": f"Bearer {issue_token(user.id, user.role)}"}

    return _header


@pytest.fixture()
def client():
    from fastapi.testclient import TestClient

    from storefront.app import build_app

    return TestClient(build_app())
