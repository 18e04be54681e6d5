"""express-setup scaffolder -- turns an answer record into an Express project.

Quick usage::

    from express_setup.models import Answers
    from express_setup.scaffolder import ProjectGenerator

    answers = Answers(project_name="api")
    generator = ProjectGenerator(answers)
    project_path = await generator.generate()
"""

from express_setup.scaffolder.generator import SCAFFOLD_FOLDERS, ProjectGenerator, ScaffoldError
from express_setup.scaffolder.installer import DependencyInstaller, InstallError
from express_setup.scaffolder.templates import TemplateRenderer

__all__ = [
    "DependencyInstaller",
    "InstallError",
    "ProjectGenerator",
    "SCAFFOLD_FOLDERS",
    "ScaffoldError",
    "TemplateRenderer",
]
