from mangum import Mangum
from todo_api.main import app

handler = Mangum(app, lifespan="auto")
