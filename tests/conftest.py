import pytest
import sys
from pathlib import Path

# Ensure src/ is in the python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from vfsname.core.providers import GenericNameProvider, HostAuthority, LocalNameProvider


@pytest.fixture
def local():
    """Provider for names on the local file system (file:///...)."""
    return LocalNameProvider()


@pytest.fixture
def ftp():
    """Provider for names on ftp://user@example.com."""
    authority = HostAuthority(hostname="example.com", default_port=21, user_name="user")
    return GenericNameProvider("ftp", authority)
