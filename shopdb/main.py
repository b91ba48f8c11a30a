# shopdb/main.py
import uvicorn
from fastapi import FastAPI

from . import order_info

app = FastAPI(
    title="Shop DB",
    description="Order info API on top of the migrated shop schema",
    version="1.0.0",
)

# Tables are created by `python -m shopdb.migrate upgrade`, not at startup.
app.include_router(order_info.router)


@app.get("/")
async def root():
    return {"message": "API is running"}


if __name__ == "__main__":
    uvicorn.run("shopdb.main:app", host="0.0.0.0", port=8000, reload=False)
