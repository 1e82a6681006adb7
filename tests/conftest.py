from pathlib import Path

import pytest

from tests.infrastructure import write, write_descriptor


@pytest.fixture
def features_dir(tmp_path: Path) -> Path:
    """
    A small install: lib/features with public, protected, private and auto features.

    javaee-8.0 -> servlet-4.0 -> servlet internals -> (cycle back to servlet-4.0)
    """
    d = tmp_path / "lib" / "features"
    write_descriptor(
        d, "com.ibm.websphere.appserver.javaee-8.0.mf",
        "com.ibm.websphere.appserver.javaee-8.0",
        visibility="public", short_name="javaee-8.0",
        features=["io.openliberty.servlet-4.0", "com.ibm.websphere.appserver.missing-1.0"],
    )
    write_descriptor(
        d, "io.openliberty.servlet-4.0.mf",
        "io.openliberty.servlet-4.0",
        visibility="public", short_name="servlet-4.0",
        features=["io.openliberty.servlet.internal-4.0"],
        bundles=["com.ibm.ws.webcontainer"],
    )
    write_descriptor(
        d, "io.openliberty.servlet.internal-4.0.mf",
        "io.openliberty.servlet.internal-4.0",
        visibility="private",
        features=["io.openliberty.servlet-4.0"],
    )
    write_descriptor(
        d, "com.ibm.websphere.appserver.transaction-1.2.mf",
        "com.ibm.websphere.appserver.transaction-1.2",
        visibility="protected",
    )
    write_descriptor(
        d, "com.ibm.websphere.appserver.servlet-jsp.mf",
        "com.ibm.websphere.appserver.servlet-jsp",
        auto=True,
    )
    return d


@pytest.fixture
def install_root(features_dir: Path) -> Path:
    """Directory whose lib/features holds the sample descriptors."""
    return features_dir.parent.parent


@pytest.fixture
def broken_descriptor(features_dir: Path) -> Path:
    return write(features_dir / "broken.mf", "Manifest-Version: 1.0\nIBM-ShortName: broken\n")
