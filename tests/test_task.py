"""Tests for the Task model."""

from task_cli.task import Task, sort_by_priority


class TestTask:
    """Test Task model functionality."""

    def test_task_creation(self):
        """Test basic task creation."""
        task = Task(priority=2, text="Test task")

        assert task.priority == 2
        assert task.text == "Test task"
        assert task.seq == 0

    def test_equality_ignores_seq(self):
        """Two records with the same priority and text are equal."""
        assert Task(1, "a", seq=0) == Task(1, "a", seq=5)
        assert Task(1, "a") != Task(2, "a")

    def test_to_line(self):
        assert Task(10, "write report").to_line() == "10 write report"

    def test_display(self):
        assert Task(2, "hello world").display(1) == "1. hello world [2]"


class TestSortByPriority:
    """Test priority ordering."""

    def test_ascending_order(self):
        tasks = [Task(5, "a"), Task(1, "b"), Task(3, "c")]

        assert [t.text for t in sort_by_priority(tasks)] == ["b", "c", "a"]

    def test_numeric_not_lexical(self):
        """10 sorts after 9."""
        tasks = [Task(10, "ten"), Task(9, "nine")]

        assert [t.priority for t in sort_by_priority(tasks)] == [9, 10]

    def test_stable_for_equal_priorities(self):
        """Tasks sharing a priority keep their input order."""
        tasks = [Task(2, "first", seq=0), Task(1, "x", seq=1), Task(2, "second", seq=2)]

        ordered = sort_by_priority(tasks)

        assert [t.text for t in ordered] == ["x", "first", "second"]

    def test_input_not_modified(self):
        tasks = [Task(2, "b"), Task(1, "a")]

        sort_by_priority(tasks)

        assert [t.text for t in tasks] == ["b", "a"]
