import pytest
from sqlalchemy import MetaData


@pytest.fixture()
def metadata() -> MetaData:
    return MetaData()
