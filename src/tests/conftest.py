"""
pytest configuration and shared fixtures for the legacy migration tests.

External services are replaced by in-memory fakes implementing the same
provider interfaces as the Firebase and Stripe adapters.
"""

import copy
import json
import os
import sys
from datetime import datetime, timezone
from pathlib import Path

import django
import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))
os.environ.setdefault("DJANGO_ENV", "test")
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "configuration.settings")

# Setup Django
django.setup()

from migrator.exceptions import IdentityProvisioningError  # noqa: E402
from migrator.models.documents import DocumentRef  # noqa: E402
from migrator.providers.base import (  # noqa: E402
    BillingProvider,
    DocumentStore,
    IdentityProvider,
    PaymentMethodSnapshot,
)

RUN_CLOCK = datetime(2024, 1, 31, 12, 0, tzinfo=timezone.utc)


# =============================================================================
# PROVIDER FAKES
# =============================================================================


class FakeIdentityProvider(IdentityProvider):
    """Allocates sequential uids and rejects duplicate emails like Firebase Auth."""

    provider_name = "fake-identity"

    def __init__(self):
        super().__init__({"fake": True})
        self.identities = {}
        self.claims = {}
        self._sequence = 0

    def is_configured(self):
        return True

    def create_identity(self, uid, display_name, email):
        known_emails = {i["email"].lower() for i in self.identities.values() if i["email"]}
        if email and email.lower() in known_emails:
            raise IdentityProvisioningError(
                message=f"The user with the provided email already exists: {email}",
                code="EMAIL_ALREADY_EXISTS",
                details={"email": email},
            )
        if uid is None:
            self._sequence += 1
            uid = f"uid-{self._sequence}"
        if uid in self.identities:
            raise IdentityProvisioningError(
                message=f"The user with the provided uid already exists: {uid}",
                code="UID_ALREADY_EXISTS",
                details={"uid": uid},
            )
        self.identities[uid] = {"display_name": display_name, "email": email}
        return uid

    def set_role_claim(self, uid, role):
        self.claims[uid] = {"role": role}


class InMemoryDocumentStore(DocumentStore):
    """Keeps written documents per collection and records the write order."""

    provider_name = "memory"

    def __init__(self):
        super().__init__({"fake": True})
        self.collections = {}
        self.writes = []
        self._sequence = 0

    def is_configured(self):
        return True

    def new_reference(self, collection):
        self._sequence += 1
        return DocumentRef(collection, f"{collection}-{self._sequence}")

    def write_document(self, collection, doc_id, fields):
        self.collections.setdefault(collection, {})[doc_id] = copy.deepcopy(fields)
        self.writes.append(f"{collection}/{doc_id}")
        return DocumentRef(collection, doc_id)

    def stream_collection(self, collection):
        return [
            {"docId": doc_id, **fields}
            for doc_id, fields in self.collections.get(collection, {}).items()
        ]

    def get(self, collection, doc_id):
        return self.collections.get(collection, {}).get(doc_id)


class FakeBillingProvider(BillingProvider):
    """Creates sequential customers and serves canned payment methods."""

    provider_name = "fake-billing"

    def __init__(self, payment_methods=None):
        super().__init__({"fake": True})
        self.payment_methods = payment_methods or {}
        self.created_customers = []
        self.listed_customers = []

    def is_configured(self):
        return True

    def create_customer(self, email):
        customer_id = f"cus_new_{len(self.created_customers) + 1}"
        self.created_customers.append((customer_id, email))
        return customer_id

    def list_payment_methods(self, customer_id, type="card"):
        self.listed_customers.append((customer_id, type))
        return list(self.payment_methods.get(customer_id, []))


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def identity_provider():
    return FakeIdentityProvider()


@pytest.fixture
def document_store():
    return InMemoryDocumentStore()


@pytest.fixture
def card_on_file():
    """A stored Visa card."""
    return PaymentMethodSnapshot(
        id="pm_card_1",
        type="card",
        last4="4242",
        brand="visa",
        exp_month=12,
        exp_year=2030,
    )


@pytest.fixture
def billing_provider(card_on_file):
    return FakeBillingProvider({"cus_existing": [card_on_file]})


@pytest.fixture
def run_clock():
    return RUN_CLOCK


@pytest.fixture
def migration_context(identity_provider, document_store, billing_provider):
    """MigrationContext wired to the in-memory fakes and a fixed clock."""
    from migrator.context import MigrationContext
    from migrator.services.pacing import NoDelayPacer

    return MigrationContext(
        identity=identity_provider,
        store=document_store,
        billing=billing_provider,
        admin_user_id="admin-test",
        pacer=NoDelayPacer(),
        clock=lambda: RUN_CLOCK,
    )


@pytest.fixture
def legacy_records():
    """
    Two customers, one employee and two assignments.

    Ada already has a billing customer and an assignment with both a
    threshold reload and a monthly subscription. Grace has no billing
    customer and an assignment with a negative balance.
    """
    return {
        "users": [
            {
                "id": 1,
                "name": "Ada Lovelace",
                "email": "ada@example.com",
                "phone": "555-0101",
                "appRole": "customer",
                "isActive": True,
                "isAuth": True,
                "stripeCustomerId": "cus_existing",
            },
            {
                "id": 2,
                "name": "Grace Hopper",
                "email": "grace@example.com",
                "phone": "555-0102",
                "appRole": "customer",
                "isActive": True,
                "isAuth": False,
            },
            {
                "id": 3,
                "name": "Alan Turing",
                "email": "alan@example.com",
                "phone": "555-0103",
                "appRole": "employee",
                "isActive": True,
                "isAuth": True,
                "uid": "uid-alan",
            },
        ],
        "assignments": [
            {
                "id": 10,
                "docId": "asg-10",
                "customerId": 1,
                "employeeId": 3,
                "availableHours": 12.345,
                "rate": "45.5",
                "cost": 30,
                "isActive": True,
                "isDeleted": False,
                "hasReload": True,
                "hasSub": True,
            },
            {
                "id": 11,
                "docId": "asg-11",
                "customerId": 2,
                "employeeId": 3,
                "availableHours": -2.5,
                "rate": 40,
                "cost": 25.005,
                "isActive": True,
            },
        ],
        "reloads": [
            {
                "id": 20,
                "docId": "rl-20",
                "assignmentId": 10,
                "minHours": 2,
                "hours": 10,
                "paymentMethodId": "pm_card_1",
                "isActive": True,
            }
        ],
        "subscriptions": [
            {
                "id": 30,
                "docId": "sub-30",
                "assignmentId": 10,
                "hours": 20,
                "paymentMethodId": "pm_card_1",
                "isActive": True,
            }
        ],
    }


@pytest.fixture
def legacy_source(legacy_records):
    from migrator.sources import InMemoryDataSource

    return InMemoryDataSource(legacy_records)


@pytest.fixture
def legacy_data_dir(tmp_path, legacy_records):
    """The legacy dataset written as JSON files, one per collection."""
    data_dir = tmp_path / "legacy"
    data_dir.mkdir()
    for name, records in legacy_records.items():
        (data_dir / f"{name}.json").write_text(json.dumps(records), encoding="utf-8")
    return data_dir


@pytest.fixture
def make_identity_provider():
    """Factory for a fresh identity provider (e.g. for a second run)."""
    return FakeIdentityProvider
