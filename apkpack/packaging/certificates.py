"""Signing certificate resolution."""

from __future__ import annotations

import os
from collections.abc import Sequence

from ..models.app import CertificateSet


def resolve_certificate(
    cert_spec: str,
    default_cert: str,
    default_cert_dir: str,
    module_source_root: str,
) -> str:
    """Resolve the primary certificate from the shape of its declaration.

    An empty declaration selects the product default, a bare name is looked
    up in the default certificate directory, and anything with a directory
    component is relative to the module.
    """
    if cert_spec == "":
        return default_cert
    directory, _ = os.path.split(cert_spec)
    if directory == "":
        return os.path.join(default_cert_dir, cert_spec)
    return os.path.join(module_source_root, cert_spec)


def resolve_certificates(
    cert_spec: str,
    additional: Sequence[str],
    default_cert: str,
    default_cert_dir: str,
    module_source_root: str,
) -> CertificateSet:
    """Resolve the full signing identity of an app.

    Additional certificates are always module-relative. Existence is not
    checked; a missing key surfaces when the signer runs.
    """
    primary = resolve_certificate(cert_spec, default_cert, default_cert_dir, module_source_root)
    return CertificateSet(
        primary=primary,
        additional=tuple(os.path.join(module_source_root, c) for c in additional),
    )
