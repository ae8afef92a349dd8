from apps.scripts.core.script import Script


class A(Script):
    def __init__(self):
        super().__init__("A", "R")

    def get_script(self):
        return "x();"


def instance():
    return A()
