from strike_zone_impact.cli.app import app

app()
