from rawprompt.main import run

run()
