CATEGORY = "cheat"
