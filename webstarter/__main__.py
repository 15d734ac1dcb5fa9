from webstarter.cli import run

run()
