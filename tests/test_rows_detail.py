from datetime import datetime, timezone

from application.catalog import Catalog
from application.detail import HELP_TEXT, detail_text
from application.rows import HEADERS, PROJECT_WIDTH, due_style, task_cells
from core import Comment, Due, Label, Project, Task

UTC = timezone.utc
NOW = datetime(2026, 10, 18, 12, 0, tzinfo=UTC)
CATALOG = Catalog(
    projects=[Project(id=1, name="Inbox"), Project(id=2, name="A very long project name")],
    labels=[Label(id=5, name="urgent"), Label(id=6, name="home")],
)


def test_cells_follow_headers():
    task = Task(id=42, content="Read [docs](https://x.test/d)", project_id=1, priority=3, due=Due(date="2026-10-18"))
    cells = task_cells(task, CATALOG, now=NOW, tz=UTC)
    assert len(cells) == len(HEADERS)
    assert [c.text for c in cells] == ["42", "2026-10-18(Sun)", "P2", "#Inbox", "Read docs"]
    assert cells[1].style == "due.today"
    assert cells[2].style == "priority.high"


def test_project_name_is_truncated():
    cells = task_cells(Task(id=1, project_id=2), CATALOG, now=NOW, tz=UTC)
    assert cells[3].text == "#A very long pro"
    assert len(cells[3].text) == PROJECT_WIDTH


def test_due_styles():
    assert due_style(Task(id=1, due=Due(date="2026-10-17")), now=NOW, tz=UTC) == "due.overdue"
    assert due_style(Task(id=1, due=Due(date="2026-10-18")), now=NOW, tz=UTC) == "due.today"
    assert due_style(Task(id=1, due=Due(date="2026-10-25")), now=NOW, tz=UTC) == ""
    assert due_style(Task(id=1), now=NOW, tz=UTC) == ""


def test_detail_layout_with_comments():
    task = Task(
        id=42,
        content="See [plan](https://x.test/s)",
        project_id=1,
        label_ids=[5, 6],
        priority=4,
        url="https://todoist.com/showTask?id=42",
        due=Due(date="2026-10-18"),
    )
    comments = [Comment(id=1, content="ok [log](https://x.test/l)", posted="2026-10-17T08:00:00Z")]
    lines = detail_text(task, CATALOG, comments, tz=UTC).split("\n")
    assert lines[0] == "Project:  #Inbox"
    assert lines[1] == "DueDate:  2026-10-18(Sun)"
    assert lines[2] == "Labels:   @urgent,@home"
    assert lines[3] == "Priority: P1"
    assert lines[4] == "URL:      https://todoist.com/showTask?id=42"
    assert lines[7] == "See [plan]( https://x.test/s )"
    assert lines[10] == "--"
    assert lines[11:] == ["2026-10-17T08:00:00Z", "ok [log]( https://x.test/l )"]


def test_detail_without_comments_has_no_separator():
    text = detail_text(Task(id=1, content="plain"), CATALOG, tz=UTC)
    assert "--" not in text.split("\n")
    assert text.endswith("plain")


def test_help_lists_every_key():
    for key in ("q", "?", "f", "r", "a", "v", "enter", "shift+c", "shift+d", "u", "e", "p", "d", "1-4"):
        assert key in HELP_TEXT
