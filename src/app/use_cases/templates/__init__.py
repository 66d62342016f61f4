"""Invoice template use cases"""
from .create_template import CreateTemplate
from .list_templates import ListTemplates
from .get_template import GetTemplate
from .update_template import UpdateTemplate
from .delete_template import DeleteTemplate
from .dtos import CreateTemplateCommandDTO, TemplateDTO, UpdateTemplateCommandDTO

__all__ = [
    "CreateTemplate",
    "ListTemplates",
    "GetTemplate",
    "UpdateTemplate",
    "DeleteTemplate",
    "CreateTemplateCommandDTO",
    "UpdateTemplateCommandDTO",
    "TemplateDTO",
]
