import pytest

SCENARIO_TEXT = (
    "Ola moved to Oslo. Kari moved to Bergen. Ola and Kari met in Oslo.\n\n"
    "Per lives in Trondheim."
)

ARTICLE_TEXT = """Storm Ingrid hit the west coast on Monday. The storm closed roads
and ferries along the coast. Power was lost in many homes on the coast.
Crews worked through the night to restore power. Schools stayed closed.
The storm is expected to weaken on Tuesday.

The government promised emergency funding. The funding will cover damaged roads
and ferries. Local mayors welcomed the funding but asked for more.

Meteorologists warned that another storm may follow"""


@pytest.fixture
def scenario_text():
    return SCENARIO_TEXT


@pytest.fixture
def article_text():
    return ARTICLE_TEXT
