# Utils package initialization
