APP_NAME = "appwhere"
