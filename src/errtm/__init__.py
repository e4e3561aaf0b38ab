"""
Layered error message builder for provisioning provider code.

Usage:
    import errtm

    VM_ERRORS = errtm.save_provider_name("TFProvider").save_resource_name("VM")
    raise VM_ERRORS.set_id("i-1").set_state(errtm.Creating).set_cause(exc).to_error()
"""

from .core import *  # noqa: F401,F403
from .core import __all__
