from dealmatch import create_app
from dealmatch.config import Config

# Create Flask app instance
app = create_app()

# Log the environment and allowed CORS origins
app.logger.info("Running in %s mode", 'development' if Config.DEBUG else 'production')
app.logger.info("Allowed CORS Origins: %s", Config.CORS_ORIGINS)

if __name__ == '__main__':
    app.run(debug=Config.DEBUG, host="0.0.0.0", port=Config.PORT)
