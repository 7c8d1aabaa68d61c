from flask import Blueprint, current_app, send_from_directory

main = Blueprint('main', __name__)

INDEX_FILE = 'index.html'


# --- Front-end estático ---
# Los demás archivos de la carpeta los sirve la ruta static de Flask.
@main.route('/')
def index():
    return send_from_directory(current_app.static_folder, INDEX_FILE)
