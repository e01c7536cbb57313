from .rest import rest_api_map
