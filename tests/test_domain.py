import pytest

from utils.domain import (
    resolve_subdomain,
    rewrite_path,
    is_excluded_path,
    get_base_domain,
    tenant_url,
    is_main_domain,
)


@pytest.mark.parametrize("hostname, expected", [
    ("red-bistro.example.com", "red-bistro"),
    ("acme.domain.tld", "acme"),
    ("acme.domain.tld:8443", "acme"),
    ("ACME.Domain.TLD", "acme"),
    ("a.b.example.co.uk", "a"),
    ("example.com", None),
    ("example.com:443", None),
    ("localhost", None),
    ("localhost:3001", None),
])
def test_resolve_subdomain_production_hosts(hostname, expected):
    assert resolve_subdomain(hostname) == expected


@pytest.mark.parametrize("hostname, expected", [
    ("gold.localhost:3001", "gold"),
    ("tenant.localhost", "tenant"),
    ("localhost", None),
    ("localhost:3001", None),
])
def test_resolve_subdomain_localhost(hostname, expected):
    assert resolve_subdomain(hostname) == expected


@pytest.mark.parametrize("hostname", [
    "www.example.com",
    "admin.example.com",
    "www.localhost:3001",
    "admin.localhost",
    "WWW.example.com",
])
def test_reserved_subdomains_never_resolve(hostname):
    assert resolve_subdomain(hostname) is None


@pytest.mark.parametrize("hostname", [
    "127.0.0.1",
    "10.0.0.5:8000",
    "[::1]:8000",
    "",
    ".example.com",
])
def test_no_subdomain_for_ip_or_malformed_hosts(hostname):
    assert resolve_subdomain(hostname) is None


def test_rewrite_root_and_sub_paths():
    assert rewrite_path("acme.domain.tld", "/") == "/tenant/acme"
    assert rewrite_path("acme.domain.tld", "") == "/tenant/acme"
    assert rewrite_path("acme.domain.tld", "/menu") == "/tenant/acme/menu"
    assert rewrite_path("gold.localhost:3001", "/contact") == "/tenant/gold/contact"


def test_rewrite_passes_through_without_tenant():
    assert rewrite_path("domain.tld", "/menu") == "/menu"
    assert rewrite_path("www.domain.tld", "/menu") == "/menu"
    assert rewrite_path("admin.domain.tld", "/") == "/"
    assert rewrite_path("localhost:3001", "/gallery") == "/gallery"


def test_rewrite_is_idempotent():
    once = rewrite_path("acme.domain.tld", "/")
    assert rewrite_path("acme.domain.tld", once) == "/tenant/acme"
    twice = rewrite_path("acme.domain.tld", rewrite_path("acme.domain.tld", "/menu"))
    assert twice == "/tenant/acme/menu"


def test_rewrite_only_treats_exact_tenant_prefix_as_rewritten():
    assert rewrite_path("acme.domain.tld", "/tenant/acme-two") == "/tenant/acme/tenant/acme-two"


@pytest.mark.parametrize("path", [
    "/api",
    "/api/health",
    "/static/styles.css",
    "/favicon.ico",
    "/sitemap.xml",
])
def test_excluded_paths_are_never_rewritten(path):
    assert is_excluded_path(path)
    assert rewrite_path("acme.domain.tld", path) == path


def test_excluded_prefix_matches_whole_segment():
    assert not is_excluded_path("/apiary")
    assert rewrite_path("acme.domain.tld", "/apiary") == "/tenant/acme/apiary"


def test_custom_excluded_prefixes():
    assert rewrite_path("acme.domain.tld", "/health", excluded_prefixes=["/health"]) == "/health"
    assert rewrite_path("acme.domain.tld", "/api/x", excluded_prefixes=[]) == "/tenant/acme/api/x"


def test_base_domain_and_tenant_url():
    assert get_base_domain("red-bistro.hehehihi.com") == "hehehihi.com"
    assert get_base_domain("hehehihi.com") == "hehehihi.com"
    assert get_base_domain("gold.localhost:3005") == "localhost:3005"
    assert get_base_domain("localhost") == "localhost:3001"
    assert tenant_url("red-bistro", "hehehihi.com", "http") == "http://red-bistro.hehehihi.com"
    assert tenant_url("gold", "localhost:3001", "http") == "http://gold.localhost:3001"
    assert tenant_url("gold") == "https://gold.hehehihi.com"


def test_is_main_domain():
    assert is_main_domain("hehehihi.com")
    assert is_main_domain("www.hehehihi.com")
    assert not is_main_domain("red-bistro.hehehihi.com")
