from iching.cli import run

run()
