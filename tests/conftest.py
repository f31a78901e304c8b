import json
import re
from copy import deepcopy

import httpx
import pytest
from fastapi.testclient import TestClient

from db.graphql_client import GraphQLConnection
from main import app

GRAPHQL_ENDPOINT = "http://cms.test/api/graphql"

TENANTS = [
    {
        "id": "t-red",
        "name": "Red Bistro",
        "slug": "red-bistro",
        "domain": "red-bistro.hehehihi.com",
        "menu": {"url": "/api/media/file/red-menu.pdf", "filename": "red-menu.pdf"},
        "logo": {"url": "/api/media/file/red-logo.png"},
        "address": "12 Ly Thai To, Hanoi",
        "phone": "0912345678",
        "email": "red@bistro.vn",
        "heroTitle": "Red Bistro",
        "heroSubtitle": "Since 1998",
        "heroDescription": "Charcoal grill and natural wine",
        "heroImage": {"url": "/api/media/file/red-hero.jpg", "filename": "red-hero.jpg"},
        "shortAboutTitle": "Our story",
        "shortAboutText": "A family kitchen on Ly Thai To street.",
        "newMenu": [{"id": "nm-1", "src": {"url": "/api/media/file/new-1.jpg", "filename": "new-1.jpg"}}],
    },
    {
        "id": "t-blue",
        "name": "Blue Bistro",
        "slug": "blue-bistro",
        "domain": "blue-bistro.hehehihi.com",
        "menu": None,
        "logo": None,
        "address": None,
        "phone": None,
        "email": None,
        "heroTitle": None,
        "heroSubtitle": None,
        "heroDescription": None,
        "heroImage": None,
        "shortAboutTitle": None,
        "shortAboutText": None,
        "newMenu": None,
    },
]

GALLERY = [
    {
        "id": "g-1",
        "image": {"url": "/api/media/file/terrace.jpg", "filename": "terrace.jpg", "alt": "terrace"},
        "caption": "Terrace",
        "branch": {"id": "t-red", "name": "Red Bistro", "slug": "red-bistro"},
    },
    {
        "id": "g-2",
        "image": {"url": "/api/media/file/bar.jpg", "filename": None, "alt": None},
        "caption": None,
        "branch": {"id": "t-blue", "name": "Blue Bistro", "slug": "blue-bistro"},
    },
    {
        "id": "g-3",
        "image": {"url": "/api/media/file/dish.jpg", "filename": "dish.jpg", "alt": "Dish"},
        "caption": None,
        "branch": {"id": "t-red", "name": "Red Bistro", "slug": "red-bistro"},
    },
]

HOME_INFORMATION = {
    "CatchPhrase1": "Taste the elements",
    "CatchPhrase2": "Fire, water, earth",
    "quote_s_": [{"quote": "Best pho in town", "id": "q-1"}, {"quote": "Come hungry", "id": "q-2"}],
}

OPERATION_RE = re.compile(r"\b(?:query|mutation)\s+(\w+)")


def operation_name(query: str) -> str:
    match = OPERATION_RE.search(query)
    return match.group(1) if match else "ping"


class FakeBackend:
    """In-memory stand-in for the CMS GraphQL endpoint."""

    def __init__(self):
        self.tenants = deepcopy(TENANTS)
        self.gallery = deepcopy(GALLERY)
        self.home_information = deepcopy(HOME_INFORMATION)
        self.customers = []
        self.contact_messages = []
        self.reservations = []
        self.calls = []
        self.failing = set()
        self.down = False

    def operations(self):
        return [name for name, _ in self.calls]

    def handler(self, request: httpx.Request) -> httpx.Response:
        if self.down:
            raise httpx.ConnectError("connection refused", request=request)
        body = json.loads(request.content)
        name = operation_name(body["query"])
        variables = body.get("variables") or {}
        self.calls.append((name, variables))
        if name in self.failing:
            return httpx.Response(200, json={
                "errors": [{"message": f"{name} failed", "locations": [{"line": 1, "column": 1}], "path": [name]}],
                "data": None,
            })
        data = getattr(self, f"op_{name}")(variables)
        return httpx.Response(200, json={"data": data})

    def op_ping(self, variables):
        return {"__typename": "Query"}

    def op_getTenants(self, variables):
        limit = variables.get("limit", 100)
        return {"Tenants": {"docs": self.tenants[:limit], "totalDocs": len(self.tenants), "limit": limit}}

    def op_getTenant(self, variables):
        docs = [t for t in self.tenants if t["slug"] == variables.get("slug")]
        return {"Tenants": {"docs": docs}}

    def op_getHomeInformation(self, variables):
        return {"HomeInformation": self.home_information}

    def op_getGallery(self, variables):
        return {"Galleries": {"docs": self.gallery, "totalDocs": len(self.gallery)}}

    def op_getCustomer(self, variables):
        docs = [c for c in self.customers if c["customerPhone"] == variables.get("customerPhone")]
        return {"Customers": {"docs": docs}}

    def op_CreateCustomer(self, variables):
        customer = {
            "id": f"cust-{len(self.customers) + 1}",
            "customerName": variables["customerName"],
            "customerPhone": variables["customerPhone"],
        }
        self.customers.append(customer)
        return {"createCustomer": customer}

    def op_CreateReservation(self, variables):
        self.reservations.append(variables)
        return {"createReservation": {
            "id": f"res-{len(self.reservations)}",
            "reservationDateTime": variables["reservationDateTime"],
            "numberOfGuests": variables["numberOfGuests"],
        }}

    def op_CreateContactMessage(self, variables):
        self.contact_messages.append(variables)
        customer = next(c for c in self.customers if c["id"] == variables["customer"])
        branch = next(t for t in self.tenants if t["id"] == variables["branch"])
        return {"createContactMessage": {
            "id": f"msg-{len(self.contact_messages)}",
            "customer": customer,
            "message": variables["message"],
            "branch": {"id": branch["id"], "name": branch["name"]},
            "status": variables["status"],
        }}


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def conn(backend):
    return GraphQLConnection(endpoint=GRAPHQL_ENDPOINT, transport=httpx.MockTransport(backend.handler))


@pytest.fixture
def client(conn):
    app.state.content_api = conn
    with TestClient(app) as test_client:
        yield test_client
