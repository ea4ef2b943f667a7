"""Services used by the gwt commands."""
