from cuadrantes import create_app


app = create_app()
