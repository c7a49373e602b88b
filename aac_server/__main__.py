# aac_server/__main__.py

import uvicorn
from aac_server.config import PORT


if __name__ == "__main__":
    uvicorn.run("aac_server.main:app", host="0.0.0.0", port=PORT)
