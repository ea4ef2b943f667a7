from gwt.cli.main import main_entry

main_entry()
