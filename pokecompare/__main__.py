import uvicorn

from pokecompare.config import Settings


def main():
    settings = Settings.from_env()
    uvicorn.run("pokecompare.main:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
