"""Unit tests for signing certificate resolution."""

from apkpack.packaging.certificates import resolve_certificates


class TestResolveCertificates:
    """Tests for resolve_certificates."""

    def test_empty_uses_product_default(self):
        certs = resolve_certificates("", [], "default.pk8", "/certs", "/src")
        assert certs.primary == "default.pk8"

    def test_bare_name_uses_certificate_dir(self):
        certs = resolve_certificates("foo", [], "default.pk8", "/certs", "/src")
        assert certs.primary == "/certs/foo"

    def test_path_is_module_relative(self):
        certs = resolve_certificates("keys/foo.pk8", [], "default.pk8", "/certs", "/src")
        assert certs.primary == "/src/keys/foo.pk8"

    def test_additional_always_module_relative(self):
        certs = resolve_certificates("platform", ["extra", "keys/other"], "d", "/certs", "/src")

        assert certs.additional == ("/src/extra", "/src/keys/other")
        assert certs.all == ["/certs/platform", "/src/extra", "/src/keys/other"]

    def test_deterministic(self):
        args = ("media", ["a"], "d", "/certs", "/src")
        assert resolve_certificates(*args) == resolve_certificates(*args)
