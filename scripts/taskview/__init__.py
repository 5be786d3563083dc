"""
taskview - terminal viewer for named task lists.

Architecture:
- models.py: Task/TaskList snapshots and the provider protocol
- store.py: JSON-backed provider (reads the store or seeds a default)
- events.py: Event Source merging key presses with a fixed-rate tick
- navigation.py: Cursor, selection state machine and the consumer loop
- projector.py: pure derivation of render-ready panes
- views/: rich renderables and the Textual render driver
- app.py: wires everything into the Textual application
- cli.py: command line entry point

Keys: j/k move down/up, l enters the task table, h returns to the lists,
q quits.
"""

__version__ = "0.1.0"
