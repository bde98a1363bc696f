from suppr.cli import run

run()
