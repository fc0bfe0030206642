"""Click plumbing for the isolderthan command.

The CLI consumes ServiceResult and maps error codes to exit statuses;
nothing below this package knows about process exit semantics.
"""
