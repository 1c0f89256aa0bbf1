import io

import pytest
from PIL import Image

from identicon.schemas import ParamConfig, InternalConfig
from identicon.schemas.resolve import resolve_config


@pytest.fixture
def pipeline_config(temp_dir) -> InternalConfig:
    """InternalConfig for pipeline tests, writing into a temp directory."""
    param = ParamConfig()
    param.output.directory = str(temp_dir)
    return resolve_config(param, None, None)


@pytest.fixture
def decode_png():
    """Decode PNG bytes into an RGB PIL image."""
    def _decode(data):
        return Image.open(io.BytesIO(data)).convert("RGB")
    return _decode
