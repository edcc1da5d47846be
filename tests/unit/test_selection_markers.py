import pytest

from common.factories import make_chain


@pytest.mark.slow
@pytest.mark.unit
def test_deep_chain_stays_within_recursion_limit():
    # 在 --env=prod 下通过插件自动跳过 slow
    item = make_chain([0.5] * 300)
    assert item.total_cost() == 50.0 + 150.0
    assert item.description().startswith("Basic Order with Extra 0 with Extra 1")
    assert item.description().endswith(" with Extra 299")
