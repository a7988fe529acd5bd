"""Command-line interface for dailynotes."""


import argparse
import json
import sys
from terminaltables import AsciiTable
from dailynotes.api import Error, Notes
from dailynotes.models import ResolvedNote

DESCRIPTION = 'Notes is a command-line application that helps you manage your notes and to-do lists.'

EPILOG = """examples:
  notes                       Create or open the daily note file
  notes --projects            List all project note files
  notes todos                 Show all to-do items from your notes
  notes my-project            Create or open the "my-project" note file

By default, notes are stored in the ~/Documents/notes directory.
Daily notes are saved in ~/Documents/notes/daily with the format YYYY-MM-DD.md.
Project notes are saved in ~/Documents/notes/projects with the format project_name.md.
"""


def total_message(total: int) -> str:
    if total == 0:
        return "You have no to-do's"
    return f'You have {total} to-do{"" if total == 1 else "s"}'


def _open(note: ResolvedNote, notes: Notes) -> int:
    if note.created:
        print(f'Created file: {note.path}')
    if not notes.open(note.path) == 0:
        print('Failed to open file with VS Code', file=sys.stderr)
    return 0


def _daily(args, notes: Notes) -> int:
    return _open(notes.daily(), notes)


def _project(args, notes: Notes) -> int:
    return _open(notes.project(args.target), notes)


def _projects(args, notes: Notes) -> int:
    for name in notes.projects():
        print(name)
    return 0


def _todos(args, notes: Notes) -> int:
    result = notes.todos()
    if args.json:
        print(json.dumps(result.as_json()))
        return 0
    if args.table:
        data = [('File', 'To-dos')] + [(r.name, str(r.count)) for r in result.reports]
        table = AsciiTable(data)
        table.justify_columns[1] = 'right'
        print(table.table)
    else:
        for report in result.reports:
            print(report.name)
            for task in report.tasks:
                print(task)
    if args.verbose:
        for error in result.skipped:
            print(f'Skipped {error}', file=sys.stderr)
    print(total_message(result.total))
    return 0


def argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='notes', description=DESCRIPTION, epilog=EPILOG,
                                     formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('target', nargs='?', metavar='PROJECT_NAME',
                        help='Name of the project note file to create or open. '
                             'Use "todos" to display a list of all to-do items from your notes instead.')
    parser.add_argument('--projects', action='store_true', help='List all existing project note files')
    todos_formats = parser.add_mutually_exclusive_group()
    todos_formats.add_argument('-j', '--json', action='store_true',
                               help='With "todos": output as JSON. The output is an object with a "files" list, '
                                    'giving the name, path and open to-dos of each file, and a "total" count.')
    todos_formats.add_argument('-t', '--table', action='store_true',
                               help='With "todos": show the number of to-dos per file as a table.')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='With "todos": list files that could not be read on stderr.')
    return parser


def _command(args):
    if args.projects:
        return _projects
    if args.target == 'todos':
        return _todos
    if args.target:
        return _project
    return _daily


def main(args=None) -> int:
    """Runs the tool and returns its exit code.

    args may be an array of string command-line arguments; if absent,
    the process's arguments are used.
    """
    parser = argparser()
    if args is None:
        args = sys.argv[1:]
    if len(args) == 1 and args[0].startswith('-') and args[0] not in ('-h', '--help', '--projects'):
        # a lone argument is a project name, even one that looks like an option
        args = ['--', args[0]]
    args = parser.parse_args(args)
    if not args.target == 'todos' and (args.json or args.table or args.verbose):
        parser.error('--json, --table and --verbose can only be used with "todos"')
    func = _command(args)
    try:
        with Notes.for_user() as notes:
            return func(args, notes)
    except Error as e:
        print(e, file=sys.stderr)
        return 1
