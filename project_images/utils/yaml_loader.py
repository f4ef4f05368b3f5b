from ruamel.yaml import YAML

def get_yaml_instance() -> YAML:
    # round-trip mode keeps comments and key order of hand-edited project files
    yaml = YAML(typ="rt")
    yaml.default_flow_style = False
    yaml.preserve_quotes = True
    yaml.width = 4096
    yaml.indent(mapping=2, sequence=4, offset=2)
    return yaml
