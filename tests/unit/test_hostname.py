"""Unit tests for hostname sanitizing used in per-device key names."""

import re
import pytest

from cargo_deploy.utils.hostname import sanitize_hostname


SAMPLE_HOSTS = [
    "",
    "_",
    "___",
    "raspberrypi",
    "pi.local",
    "10.0.0.5",
    "192.168.001.042",
    "fe80::1%eth0",
    "[2001:db8::ff00:42:8329]",
    "my-host_name",
    "a__b___c",
    "_leading_trailing_",
    "..dots..",
    "host name with spaces",
    "ünïcödé.example",
    "jetson🚀nano",
    "UPPER.lower-123",
    "-dash-edges-",
    "__x__",
    "\t\n",
]


class TestSanitizeHostnameExamples:
    """Known inputs and outputs."""

    def test_empty_string(self):
        assert sanitize_hostname("") == ""

    def test_collapses_underscore_runs(self):
        assert sanitize_hostname("a__b___c") == "a_b_c"

    def test_strips_edge_underscores(self):
        assert sanitize_hostname("_leading_trailing_") == "leading_trailing"

    def test_ipv4(self):
        assert sanitize_hostname("10.0.0.5") == "10_0_0_5"

    def test_plain_hostname_unchanged(self):
        assert sanitize_hostname("raspberrypi") == "raspberrypi"

    def test_dashes_are_kept(self):
        assert sanitize_hostname("-dash-edges-") == "-dash-edges-"

    def test_ipv6_with_zone(self):
        assert sanitize_hostname("fe80::1%eth0") == "fe80_1_eth0"

    def test_non_ascii_letters_replaced(self):
        assert sanitize_hostname("ünïcödé.example") == "n_c_d_example"

    def test_only_separators(self):
        assert sanitize_hostname("...") == ""


class TestSanitizeHostnameProperties:
    """Invariants that hold for every input."""

    @pytest.mark.parametrize("host", SAMPLE_HOSTS)
    def test_only_allowed_characters(self, host):
        assert re.fullmatch(r"[A-Za-z0-9_-]*", sanitize_hostname(host))

    @pytest.mark.parametrize("host", SAMPLE_HOSTS)
    def test_no_double_underscore(self, host):
        assert "__" not in sanitize_hostname(host)

    @pytest.mark.parametrize("host", SAMPLE_HOSTS)
    def test_no_edge_underscore(self, host):
        result = sanitize_hostname(host)
        assert not result.startswith("_")
        assert not result.endswith("_")

    @pytest.mark.parametrize("host", SAMPLE_HOSTS)
    def test_idempotent(self, host):
        once = sanitize_hostname(host)
        assert sanitize_hostname(once) == once

    @pytest.mark.parametrize("host", SAMPLE_HOSTS)
    def test_deterministic(self, host):
        assert sanitize_hostname(host) == sanitize_hostname(host)
