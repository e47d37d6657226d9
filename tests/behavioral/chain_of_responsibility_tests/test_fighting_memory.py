import logging

import pytest
from behavioral.chain_of_responsibility.fighting_memory import FightingMemory, ShieldTechnique, SwordTechnique, \
    Technique


class RecordingTechnique(Technique):
    def __init__(self, name, log):
        self.name = name
        self._log = log

    def perform(self, name):
        self._log.append(self.name)
        return super().perform(name)

    def execute(self): pass


class LearningTechnique(Technique):
    name = "study"

    def __init__(self, memory, log):
        self._memory = memory
        self._log = log

    def execute(self):
        self._memory.add(RecordingTechnique("late", self._log))


@pytest.mark.unit
def test_parry_only_shield_answers(capsys):
    memory = FightingMemory().add(SwordTechnique()).add(ShieldTechnique())
    memory.recall("parry")
    assert capsys.readouterr().out == "KLANG!\n"


@pytest.mark.unit
def test_double_cut_only_sword_answers(capsys):
    memory = FightingMemory().add(SwordTechnique()).add(ShieldTechnique())
    memory.recall("doubleCut")
    assert capsys.readouterr().out == "cut cut!\n"


@pytest.mark.unit
def test_recall_visits_every_technique_in_order():
    log = []
    memory = FightingMemory()
    for n in ("a", "b", "a", "c"):
        memory.add(RecordingTechnique(n, log))
    assert memory.recall("a") is None
    assert log == ["a", "b", "a", "c"]


@pytest.mark.unit
def test_unknown_name_and_empty_memory_are_silent(capsys):
    FightingMemory().recall("parry")
    FightingMemory().add(SwordTechnique()).recall("somersault")
    assert capsys.readouterr().out == ""


@pytest.mark.unit
def test_perform_reports_whether_handled(capsys):
    assert ShieldTechnique().perform("parry") is True
    assert ShieldTechnique().perform("doubleCut") is False
    assert capsys.readouterr().out == "KLANG!\n"


@pytest.mark.unit
def test_recall_first_stops_at_first_handler():
    log = []
    memory = FightingMemory()
    for n in ("a", "b", "b", "c"):
        memory.add(RecordingTechnique(n, log))
    assert memory.recall_first("b") is True
    assert log == ["a", "b"]
    assert memory.recall_first("z") is False
    assert FightingMemory().recall_first("b") is False


@pytest.mark.unit
def test_technique_added_during_recall_waits_for_next_recall():
    log = []
    memory = FightingMemory()
    memory.add(LearningTechnique(memory, log))
    memory.recall("study")
    assert log == [] and len(memory) == 2
    memory.recall("anything")
    assert log == ["late"]


@pytest.mark.unit
def test_iteration_follows_insertion_order():
    sword, shield = SwordTechnique(), ShieldTechnique()
    memory = FightingMemory().add(shield).add(sword).add(shield)
    assert list(memory) == [shield, sword, shield]


class NamelessTechnique(Technique):
    def execute(self): print("oops")


@pytest.mark.unit
def test_nameless_technique_answers_to_nothing(capsys):
    memory = FightingMemory().add(NamelessTechnique())
    memory.recall("")
    assert memory.recall_first("") is False
    assert capsys.readouterr().out == ""


@pytest.mark.unit
def test_recall_logs_dispatch_and_handler(caplog):
    caplog.set_level(logging.DEBUG, logger="behavioral.chain_of_responsibility.fighting_memory")
    FightingMemory().add(SwordTechnique()).add(ShieldTechnique()).recall("parry")
    messages = [r.getMessage() for r in caplog.records]
    assert "Recalling 'parry' across 2 technique(s)" in messages
    assert "ShieldTechnique handled 'parry'" in messages
