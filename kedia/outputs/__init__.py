# kedia/outputs/__init__.py
from importlib import import_module

OUTPUT_MODULES = {
    'csv': 'kedia.outputs.csv_output.CSVOutput',
}


def get_output(name, config):
    path = config.get('output_modules', OUTPUT_MODULES)[name]
    module_name, cls_name = path.rsplit('.', 1)
    mod = import_module(module_name)
    return getattr(mod, cls_name)(config)
