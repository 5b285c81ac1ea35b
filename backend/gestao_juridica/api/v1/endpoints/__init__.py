"""
Endpoints da API v1.

Módulos disponíveis:
- agenda: Compromissos do escritório
- auth: Cadastro, login e credenciais
- clientes: Gestão de clientes
- contatos: Pedidos de contato do site público
- equipe: Membros e convites
- escritorio: Configurações do escritório
- financeiro: Lançamentos e recibos
- health: Health check
- ia: Petições, resumos e andamentos com Gemini
- modelos: Modelos de documento
- perfil: Perfil do usuário
- processos: Processos, colaboradores, andamentos, documentos e chat
- ws: Assinaturas em tempo real
"""
