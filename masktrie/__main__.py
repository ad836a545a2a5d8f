from masktrie.cli import run

run()
