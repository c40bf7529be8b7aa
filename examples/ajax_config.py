{
    "supported": [
        "text/html",
        "application/json",
        ],
    "loglevel": "info",
    "logformat": "%(asctime)s %(levelname)s  [%(name)s] %(message)s",
}
