from typing import Dict, List, Union


class Config:
    def __init__(
        self,
        platform: str,
        architecture: Union[str, List[str]],
        sandbox_root: str,
        client_root: str,
        build_configurations: Dict[str, str],
        build_type: str = "static_library",
        **kwargs
    ):
        self.platform = platform
        self.architecture = architecture
        self.sandbox_root = sandbox_root
        self.client_root = client_root
        # name -> build style tag ("debug", "release"), declaration order matters
        self.build_configurations = dict(build_configurations)
        self.build_type = build_type
        self.__dict__.update(kwargs)
