from django_dash.blocks.base import BaseBlock
from django_dash.configuration import Configuration
from django_dash.context import DashContext


class DashBlock(BaseBlock):
    """Renders one saved :class:`~django_dash.models.BlockInstance`.

    Nothing is queried unless the block's configuration is complete.
    """

    template_name = "dash/block.html"
    not_configured_template_name = "dash/block_not_configured.html"

    def __init__(self, instance, configuration_class=Configuration):
        self.instance = instance
        self.configuration_class = configuration_class
        # Per-request, so state never leaks between requests.
        self._configurations = {}

    def get_configuration(self, request):
        key = id(request)
        if key not in self._configurations:
            context = DashContext.from_request(request, instance_id=self.instance.pk)
            self._configurations[key] = self.configuration_class.create_from_instance(self.instance, context)
        return self._configurations[key]

    def get_template_name(self, request):
        if not self.get_configuration(request).is_fully_configured():
            return self.not_configured_template_name
        return self.template_name

    def get_config(self, request):
        configuration = self.get_configuration(request)
        data_source = configuration.get_template()
        return {
            "block": self.instance,
            "block_title": str(self.instance),
            "instance_id": self.instance.pk,
            "is_fully_configured": configuration.is_fully_configured(),
            "data_source_name": data_source.get_name() if data_source is not None else "",
        }

    def get_data(self, request):
        configuration = self.get_configuration(request)
        if not configuration.is_fully_configured():
            return {}
        return configuration.get_template().export_for_template(request)

    def render(self, request):
        try:
            return super().render(request)
        finally:
            self._configurations.pop(id(request), None)
