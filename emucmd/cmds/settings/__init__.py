CATEGORY = "settings"
