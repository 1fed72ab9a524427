"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority, Workload, FilterSpec, SortSpec)
- task_store.py: in-memory ordered task list + category labels
- task_view.py: filter -> sort pipeline producing the display order
- task_stats.py: summary counters for the statistics panel
- exporter.py: CSV / JSON / Markdown rendering and export file writes
- errors.py: error taxonomy shared by the above
"""
