"""Fuentes de búsqueda (registries concretos).

Por qué un paquete:
- Agrupa módulos por registry (crates.io, npm, jsDelivr, Docker Hub).
- Cada módulo implementa `core.interfaces.searcher.RegistrySearcher` y expone
  además una corrutina `search_<fuente>` para uso directo como librería.
"""

from adapters.registry_sources.crates import CratesSearcher, search_crates
from adapters.registry_sources.docker import DockerSearcher, search_docker
from adapters.registry_sources.jsdelivr import JsDelivrSearcher, search_jsdelivr
from adapters.registry_sources.npm import NpmSearcher, search_npm

__all__ = [
	"CratesSearcher",
	"DockerSearcher",
	"JsDelivrSearcher",
	"NpmSearcher",
	"search_crates",
	"search_docker",
	"search_jsdelivr",
	"search_npm",
]
