import time

import pytest

LAYER_ORDER = ["unit", "contract", "integration", "e2e"]


def pytest_configure(config):
    """注册分层标记"""
    config.addinivalue_line("markers", "unit: 单元测试")
    config.addinivalue_line("markers", "contract: 数据结构契约测试")
    config.addinivalue_line("markers", "integration: 组件串联测试")
    config.addinivalue_line("markers", "e2e: 端到端演示测试")
    config.addinivalue_line("markers", "slow: 慢测试，prod 环境跳过")


def pytest_collection_modifyitems(config, items):
    """生产环境跳过慢测试，并按层级排序"""
    if config.getoption("--env") == "prod":
        for item in items:
            if item.get_closest_marker("slow"):
                item.add_marker(pytest.mark.skip(reason="生产环境跳过慢测试"))

    def item_priority(item):
        markers = [m.name for m in item.iter_markers()]
        for rank, name in enumerate(LAYER_ORDER):
            if name in markers:
                return rank
        return len(LAYER_ORDER)

    items.sort(key=item_priority)


def pytest_sessionstart(session):
    session.config._session_start = time.time()


def pytest_terminal_summary(terminalreporter, exitstatus):
    """测试结束后的输出摘要"""
    counts = terminalreporter.stats
    passed = len(counts.get("passed", []))
    failed = len(counts.get("failed", []))
    skipped = len(counts.get("skipped", []))
    terminalreporter.write_sep("=", "自定义摘要: 用例统计")
    terminalreporter.write_line(f"通过: {passed}  失败: {failed}  跳过: {skipped}")
    start = getattr(terminalreporter.config, "_session_start", None)
    if start:
        terminalreporter.write_line(f"总耗时: {time.time() - start:.2f}秒")
    for report in counts.get("failed", []):
        last_line = str(report.longrepr).splitlines()[-1] if report.longrepr else ""
        terminalreporter.write_line(f"失败: {report.nodeid} - {last_line}")
