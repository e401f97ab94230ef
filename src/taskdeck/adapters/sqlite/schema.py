"""Table definitions for the taskdeck SQLite database.

Timestamps are stored as ISO 8601 text in UTC. Priority is stored as its
integer value, status as its string value.
"""

from __future__ import annotations

CREATE_TASKS_TABLE = """
CREATE TABLE IF NOT EXISTS tasks (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    description TEXT,
    priority INTEGER NOT NULL DEFAULT 2,
    status TEXT NOT NULL DEFAULT 'todo',
    due_date TEXT,
    reminder_time TEXT,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL,
    completed_at TEXT,
    pomodoro_count INTEGER NOT NULL DEFAULT 0,
    CHECK (pomodoro_count >= 0),
    CHECK ((status = 'done') = (completed_at IS NOT NULL))
)
"""

# Notes only reference tasks; deleting a task detaches its notes.
CREATE_NOTES_TABLE = """
CREATE TABLE IF NOT EXISTS notes (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    content TEXT NOT NULL DEFAULT '',
    task_id INTEGER,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL,
    FOREIGN KEY (task_id) REFERENCES tasks(id) ON DELETE SET NULL
)
"""

CREATE_POMODORO_SESSIONS_TABLE = """
CREATE TABLE IF NOT EXISTS pomodoro_sessions (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    task_id INTEGER,
    start_time TEXT NOT NULL,
    end_time TEXT,
    duration_minutes INTEGER NOT NULL,
    completed INTEGER NOT NULL DEFAULT 0,
    FOREIGN KEY (task_id) REFERENCES tasks(id) ON DELETE SET NULL
)
"""

CREATE_CONFIG_TABLE = """
CREATE TABLE IF NOT EXISTS config (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
)
"""

ALL_TABLES = (
    CREATE_TASKS_TABLE,
    CREATE_NOTES_TABLE,
    CREATE_POMODORO_SESSIONS_TABLE,
    CREATE_CONFIG_TABLE,
)

ALL_INDEXES = (
    "CREATE INDEX IF NOT EXISTS idx_tasks_due_date ON tasks(due_date)",
    "CREATE INDEX IF NOT EXISTS idx_tasks_status ON tasks(status)",
    "CREATE INDEX IF NOT EXISTS idx_tasks_priority ON tasks(priority)",
    "CREATE INDEX IF NOT EXISTS idx_tasks_reminder ON tasks(reminder_time)",
    "CREATE INDEX IF NOT EXISTS idx_notes_task_id ON notes(task_id)",
    "CREATE INDEX IF NOT EXISTS idx_sessions_task ON pomodoro_sessions(task_id)",
    "CREATE INDEX IF NOT EXISTS idx_sessions_start ON pomodoro_sessions(start_time)",
)
