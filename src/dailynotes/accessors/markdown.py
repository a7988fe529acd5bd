import re
from typing import List

from dailynotes.accessors.base import Accessor, ParseError
from dailynotes.models import TaskState

OPEN_TASK_RE = re.compile(r'(?m)^(.*)-\s*\[\s*\](.*)$')
COMPLETED_TASK_RE = re.compile(r'-\s*\[x\]')


def classify_line(line: str) -> TaskState:
    """Decides whether a single line is an open task-list item, a completed one, or neither.

    A line that has both an open and a completed checkbox counts as completed. Only a lowercase ``x``
    marks a task as completed.
    """
    if COMPLETED_TASK_RE.search(line):
        return TaskState.COMPLETED
    if OPEN_TASK_RE.search(line):
        return TaskState.OPEN
    return TaskState.NONE


def extract_open_tasks(doc: str) -> List[str]:
    """Returns the open task lines in the document, in order, with surrounding whitespace removed."""
    # lines are checked one at a time so that \s can't match across a line break
    return [line.strip() for line in doc.split('\n') if classify_line(line) == TaskState.OPEN]


class MarkdownAccessor(Accessor):
    """Responsible for reading to-dos from Markdown files.

    Any line containing ``- [ ]`` (with any amount of whitespace inside the brackets, or between the dash and
    the brackets) is an open to-do, unless the same line also contains ``- [x]``. The whole line is reported,
    including any text before the checkbox:

    .. code-block:: markdown

       # Groceries
       - [ ] buy milk
       - [x] buy eggs
       Remember to - [ ] call the bakery

    Here the first and third list items would be reported.

    Parsing is done via regex, so checkboxes inside code blocks are treated like any others.
    """
    def _load(self):
        try:
            with open(self.path, 'r', encoding='utf-8') as file:
                text = file.read()
        except UnicodeDecodeError as e:
            raise ParseError('File is not valid UTF-8 text', self.path, e)
        except OSError as e:
            raise ParseError('Unable to read file', self.path, e)
        self.tasks = extract_open_tasks(text)

    def _tasks(self):
        return self.tasks
