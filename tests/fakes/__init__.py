from tests.fakes.fake_query_engine import FakeQueryEngine
from tests.fakes.fake_script_runner import FakeScriptRunner

__all__ = ["FakeQueryEngine", "FakeScriptRunner"]
