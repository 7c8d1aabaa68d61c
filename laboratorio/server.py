import os


def resolve_ssl_context(app):
    """Devuelve (cert, key) si HTTPS está activo y los archivos existen.

    Si USE_HTTPS está activo pero faltan los archivos se sirve HTTP plano.
    """
    if not app.config.get('USE_HTTPS'):
        return None

    cert = app.config.get('SSL_CERT_FILE')
    key = app.config.get('SSL_KEY_FILE')
    if cert and key and os.path.isfile(cert) and os.path.isfile(key):
        return cert, key

    app.logger.warning('USE_HTTPS activo pero no se encontraron %s / %s; se usará HTTP', cert, key)
    return None


def run_server(app):
    ssl_context = resolve_ssl_context(app)
    scheme = 'https' if ssl_context else 'http'
    host = app.config['HOST']
    port = app.config['PORT']
    app.logger.info('Servidor corriendo en %s://%s:%s', scheme, host, port)
    app.run(host=host, port=port, ssl_context=ssl_context)
