import pytest

from analysis import InsightRequester, ResultRecorder
from models import SweatReadings


class FakeQuery:
    def __init__(self, table):
        self.table = table
        self.filters = []

    def insert(self, rows):
        self.table.pending = rows
        return self

    def select(self, columns):
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def order(self, column, desc=False):
        return self

    def execute(self):
        if self.table.error is not None:
            raise self.table.error
        if self.table.pending is not None:
            self.table.rows.extend(self.table.pending)
            self.table.pending = None
            return FakeResponse(self.table.rows)
        rows = [r for r in self.table.rows if all(r.get(c) == v for c, v in self.filters)]
        return FakeResponse(rows)


class FakeResponse:
    def __init__(self, data):
        self.data = data


class FakeTable:
    def __init__(self):
        self.rows = []
        self.pending = None
        self.error = None


class FakeSupabase:
    """Just enough of the supabase client for table inserts and selects."""

    def __init__(self):
        self.tables = {}

    def table(self, name):
        return FakeQuery(self.tables.setdefault(name, FakeTable()))


class FakeGenerator:
    def __init__(self, reply="**Great** news, keep hydrated.", error=None):
        self.reply = reply
        self.error = error
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake_supabase():
    return FakeSupabase()


@pytest.fixture
def generator():
    return FakeGenerator()


@pytest.fixture
def requester(generator):
    return InsightRequester(generator)


@pytest.fixture
def recorder(fake_supabase):
    return ResultRecorder(fake_supabase, table="sweat_results")


@pytest.fixture
def readings():
    return SweatReadings(glucose="Moderate blue", ph="Neutral green",
                         cortisol="Faint", salt="Moderate")
