from flask_sqlalchemy import SQLAlchemy
from flask_bcrypt import Bcrypt
from flask_wtf.csrf import CSRFProtect
from flask_cors import CORS

db = SQLAlchemy()
bcrypt = Bcrypt()
csrf = CSRFProtect()
cors = CORS()
