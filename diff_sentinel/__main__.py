from diff_sentinel.cli.main import app

app()
