from laboratorio import create_app
from laboratorio.server import run_server

app = create_app()


if __name__ == '__main__':
    run_server(app)
