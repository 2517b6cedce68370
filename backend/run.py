from seice.app import create_app

app = create_app()

if __name__ == '__main__':
    port = app.config['PORT']
    print(f"Servidor SEICE iniciado en puerto {port}")
    print(f"Documentación Swagger: http://localhost:{port}/apidocs")
    app.run(host='0.0.0.0', port=port, debug=app.config['DEBUG'])
