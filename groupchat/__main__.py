import uvicorn

from groupchat.core.config import settings


def main():
    uvicorn.run("groupchat.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
