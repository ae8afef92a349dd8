from apps.scripts.core.script import Script


class C(Script):
    def __init__(self):
        super().__init__("C", "R")

    def initialize(self):
        self.add_dependencies(["A", "A"])

    def get_script(self):
        return "z();"


def instance():
    return C()
