"""Qt GUI for selecting roles, orchestrations, batch templates and ITSM processes to export."""
