"""Pytest configuration and fixtures."""

import json
import pytest
import tempfile
from pathlib import Path


REFERENCE_LINES = [
    '[',
    '  "annotated-json reference document",',
    '',
    '  "",',
    '  ["server", [',
    '    "listening address",',
    '    {"host": "127.0.0.1"},',
    '    {"port": 8080},',
    '',
    '    "",',
    '    "TLS settings",',
    '    ["tls", [',
    '      {"enabled": false},',
    '      {"ciphers": [',
    '        "TLS_AES_128_GCM_SHA256",',
    '        "TLS_AES_256_GCM_SHA384"',
    '      ]}',
    '    ]],',
    '    "end of server section"',
    '  ]],',
    '  ["empty", [',
    '',
    '  ]],',
    '  ["notes", [',
    '    "this section only holds comments"',
    '  ]],',
    '  {"limits": {',
    '    "rate": 10.5,',
    '    "burst": null',
    '  }},',
    '  "trailing comment"',
    ']',
]


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def reference_text():
    """Reference document in canonical layout, LF terminated."""
    return "\n".join(REFERENCE_LINES) + "\n"


@pytest.fixture
def reference_text_crlf():
    """Reference document in canonical layout, CRLF terminated."""
    return "\r\n".join(REFERENCE_LINES) + "\r\n"


@pytest.fixture
def reference_array(reference_text):
    """Reference document decoded into plain JSON values."""
    return json.loads(reference_text)


@pytest.fixture
def reference_data():
    """Data tree expected from parsing the reference document."""
    return {
        "server": {
            "host": "127.0.0.1",
            "port": 8080,
            "tls": {
                "enabled": False,
                "ciphers": ["TLS_AES_128_GCM_SHA256", "TLS_AES_256_GCM_SHA384"],
            },
        },
        "empty": {},
        "notes": {},
        "limits": {"rate": 10.5, "burst": None},
    }
