from apps.scripts.core.repository import POSITION_FIRST
from apps.scripts.core.script import Script


class B(Script):
    def __init__(self):
        super().__init__("B", "R")

    def initialize(self):
        self.position = POSITION_FIRST
        self.add_dependencies(["A"])

    def get_script(self):
        return "\r\n\r\ny();\r\n\r\n"


def instance():
    return B()
