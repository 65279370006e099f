import datetime
import io
import logging
import pathlib

import pytest

LOG_DIR = pathlib.Path(__file__).parent / "test-logs"


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    # Attach the TestReport (with .outcome) to the item so fixtures can see the
    # outcome in teardown.
    outcome = yield
    rep = outcome.get_result()
    setattr(item, "rep_" + rep.when, rep)


@pytest.fixture(autouse=True)
def capture_test_logs(request):
    """Capture logging for each test into an in-memory buffer and write it to
    a file only when the test fails.

    The 'polygraph' logger does not propagate to the root logger, so the
    buffer handler is attached to both.
    """
    targets = [logging.getLogger(), logging.getLogger('polygraph')]
    saved = [(lg, list(lg.handlers), lg.level) for lg in targets]
    for lg in targets:
        for h in list(lg.handlers):
            lg.removeHandler(h)

    buf = io.StringIO()
    handler = logging.StreamHandler(buf)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    for lg in targets:
        lg.addHandler(handler)
        lg.setLevel(logging.DEBUG)

    try:
        yield buf
    finally:
        for lg, handlers, level in saved:
            lg.removeHandler(handler)
            lg.setLevel(level)
            for h in handlers:
                lg.addHandler(h)

        rep = getattr(request.node, "rep_call", None)
        if rep is not None and getattr(rep, "outcome", None) == "failed":
            LOG_DIR.mkdir(exist_ok=True)
            nodeid = request.node.nodeid.replace("::", "__").replace("/", "_")
            ts = datetime.datetime.now().strftime("%Y%m%dT%H%M%S")
            fname = LOG_DIR / "{}__{}.log".format(nodeid, ts)
            try:
                with open(fname, "w", encoding="utf-8") as f:
                    f.write("=== Test: {}\n".format(request.node.nodeid))
                    f.write("=== Timestamp: {}\n\n".format(ts))
                    f.write(buf.getvalue())
            except OSError:
                # Never fail teardown over a log file
                pass
