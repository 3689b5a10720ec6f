import base64

import pytest

from ech_builders import build_contents, build_entry, build_list


@pytest.fixture
def contents() -> bytes:
    return build_contents()

@pytest.fixture
def entry(contents: bytes) -> bytes:
    return build_entry(contents)

@pytest.fixture
def config_list(entry: bytes) -> bytes:
    return build_list(entry)

@pytest.fixture
def config_list_b64(config_list: bytes) -> str:
    return base64.b64encode(config_list).decode('ascii')
