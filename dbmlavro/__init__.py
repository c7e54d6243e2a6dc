import importlib

mod = "dbmlavro"
class LazyLoader:
    """
    Lazy loader for the dbmlavro entry points, so that importing the package
    does not import the DBML parser.
    """
    def __init__(self, mappings):
        self._modules = {}
        self._mappings = mappings

    def _load_module(self, module_name):
        if module_name not in self._modules:
            self._modules[module_name] = importlib.import_module(module_name)
        return self._modules[module_name]

    def __getattr__(self, item):
        if item in self._mappings:
            module_name, attr_name = self._mappings[item]
            module = self._load_module(module_name)
            return getattr(module, attr_name)
        else:
            return self._load_module(f"{mod}.{item}")

# Define the public names and their corresponding module paths
_mappings = {
    "Config": (f"{mod}.config", "Config"),
    "ConfigBuilder": (f"{mod}.config", "ConfigBuilder"),
    "DbmlToAvro": (f"{mod}.dbmltoavro", "DbmlToAvro"),
    "Result": (f"{mod}.dbmltoavro", "Result"),
    "convert_dbml_to_avro": (f"{mod}.dbmltoavro", "convert_dbml_to_avro"),
    "parse_dbml": (f"{mod}.dbmlparser", "parse_dbml"),
    "TypeMapper": (f"{mod}.typemapper", "TypeMapper"),
    "NameValidator": (f"{mod}.validators", "NameValidator"),
    "NamespaceValidator": (f"{mod}.validators", "NamespaceValidator"),
}

_lazy_loader = LazyLoader(_mappings)

def __getattr__(name):
    return getattr(_lazy_loader, name)
