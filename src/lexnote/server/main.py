"""
Lexnote API Server.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from lexnote.core.errors import ParseError
from lexnote.server.routes import collections, decode, notebooks


app = FastAPI(title="Lexnote API")

app.include_router(decode.router)
app.include_router(collections.router)
app.include_router(notebooks.router)


@app.exception_handler(ParseError)
async def parse_error_handler(request: Request, exc: ParseError):
    """A notebook that does not decode is a bad request, whichever route saw it."""
    return JSONResponse(status_code=400, content={"detail": exc.to_dict()})


@app.get("/")
async def root():
    return {"name": "Lexnote API", "version": "0.1.0"}
